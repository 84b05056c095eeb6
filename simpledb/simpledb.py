import http.client
import logging
import time

import httplib2

from simpledb import params as P
from simpledb import parsers
from simpledb.errors import SimpleDBError, TransportError
from simpledb.regions import get_region
from simpledb.signing import RequestSigner, SignatureMethod_HMAC_SHA1


__all__ = ['SimpleDB', 'Result']


log = logging.getLogger(__name__)


class Result(object):
    """
    The outcome of a SimpleDB call: either a `value` or an `error`, never
    both. `error` is a `SimpleDBError` subclass (`TransportError`,
    `APIError`, `ParseError` or `EncodingError`).

    Listing actions set `next_token` when more results are available; pass
    it back to the same action to fetch the next page.
    """

    def __init__(self, value=None, error=None, next_token=None, request_id=None,
                 box_usage=None, status=None):
        self.value = value
        self.error = error
        self.next_token = next_token
        self.request_id = request_id
        self.box_usage = box_usage
        self.status = status

    @property
    def ok(self):
        return self.error is None

    def unwrap(self):
        """Returns the value, raising the error if the call failed."""
        if self.error is not None:
            raise self.error
        return self.value

    def __bool__(self):
        return self.ok

    def __repr__(self):
        if self.error is not None:
            return '<Result: error %r>' % (self.error,)
        return '<Result: %r>' % (self.value,)


class SimpleDB(object):
    """Represents a connection to Amazon SimpleDB."""

    service_version = '2009-04-15'
    signature_method = SignatureMethod_HMAC_SHA1

    def __init__(self, aws_access_key, aws_secret_access_key, region, secure=True,
                 http=None, timeout=None, clock=time.time, expires_in=600):
        """
        Use your `aws_access_key` and `aws_secret_access_key` to create a connection to
        Amazon SimpleDB.

        `region` picks the SimpleDB endpoint and is required. It can be a
        `Region` or a region name such as ``'us-east-1'``.

        The optional `secure` argument specifies whether HTTPS should be used. The
        default value is ``True``.

        `http` is the transport, any object with the ``request`` method of
        ``httplib2.Http``. By default each call uses a new ``httplib2.Http``
        with the given `timeout`, so the connection can be shared between
        threads.
        """

        self.region = get_region(region)
        if secure:
            self.scheme = 'https'
        else:
            self.scheme = 'http'
        self.http = http
        self.timeout = timeout
        self.signer = RequestSigner(aws_access_key, aws_secret_access_key, clock=clock,
                                    expires_in=expires_in, signature_method=self.signature_method,
                                    version=self.service_version)

    @property
    def aws_key(self):
        return self.signer.aws_key

    def _sdb_url(self, query):
        return '%s://%s/?%s' % (self.scheme, self.region.endpoint, query)

    def _get_http(self):
        if self.http is not None:
            return self.http
        return httplib2.Http(timeout=self.timeout)

    def _call(self, params, parser):
        # Sign, send and decode one request. Every failure ends up in the Result.
        action = dict(params)['Action']
        try:
            query = self.signer.sign('GET', self.region.endpoint, params)
        except SimpleDBError as e:
            return Result(error=e)

        log.debug('%s request to %s', action, self.region.endpoint)
        try:
            response, content = self._get_http().request(self._sdb_url(query), 'GET')
        except (httplib2.HttpLib2Error, http.client.HTTPException, OSError) as e:
            log.warning('%s request to %s failed: %s', action, self.region.endpoint, e)
            return Result(error=TransportError('%s request failed: %s' % (action, e), cause=e))

        status = response.status
        log.debug('%s response: HTTP %s', action, status)
        try:
            value, next_token, request_id, box_usage = parsers.parse_response(
                content, action, parser, status=status)
        except SimpleDBError as e:
            log.warning('%s failed: %s', action, e)
            return Result(error=e, status=status, request_id=getattr(e, 'request_id', None),
                          box_usage=getattr(e, 'box_usage', None))
        return Result(value, next_token=next_token, request_id=request_id,
                      box_usage=box_usage, status=status)

    def create_domain(self, name):
        """
        Creates a new domain.

        The domain `name` argument must be a string, and must be unique among
        the domains associated with your AWS Access Key. The CreateDomain operation
        may take 10 or more seconds to complete. By default, you can create up to
        100 domains per account.
        """
        return self._call(P.domain_params('CreateDomain', name), parsers.parse_empty)

    def delete_domain(self, domain):
        """
        Deletes a domain. Any items (and their attributes) in the domain are
        deleted as well. The DeleteDomain operation may take 10 or more seconds
        to complete.

        The `domain` argument can be a string representing the name of the
        domain, or a `Domain` object.
        """
        return self._call(P.domain_params('DeleteDomain', domain), parsers.parse_empty)

    def list_domains(self, max_number_of_domains=100, next_token=None):
        """
        Lists the domains associated with your AWS Access Key, at most
        `max_number_of_domains` at a time. The result's `next_token` is set
        when there are more domains to list.
        """
        return self._call(P.list_domains_params(max_number_of_domains, next_token),
                          parsers.parse_list_domains)

    def domain_metadata(self, domain):
        """
        Returns information about the domain. Includes when the domain was
        created, the number of items and attributes, and the size of attribute
        names and values.
        """
        return self._call(P.domain_params('DomainMetadata', domain), parsers.parse_domain_metadata)

    def put_attributes(self, domain, item, attributes):
        """
        Creates or replaces attributes in an item.

        `attributes` is a sequence of `Attribute` objects or ``(name, value[,
        replace])`` tuples, or a dictionary of names -> values. Attributes
        without `replace` are added next to the existing values, since
        SimpleDB allows several values per attribute.
        """
        return self._call(P.put_attributes_params(domain, item, attributes), parsers.parse_empty)

    def batch_put_attributes(self, domain, items):
        """
        Performs multiple PutAttribute operations in a single call. This yields
        savings in round trips and latencies and enables SimpleDB to optimize
        your request, which generally yields better throughput.

        The `items` argument should be a list of `Item` objects or a list of
        (<item name>, <attributes>) tuples. SimpleDB accepts at most 25 items
        per call.
        """
        return self._call(P.batch_params('BatchPutAttributes', domain, items), parsers.parse_empty)

    def delete_attributes(self, domain, item, attributes=()):
        """
        Deletes one or more attributes associated with an item. If all attributes of
        an item are deleted, the item is deleted.

        If `attributes` is empty the whole item is deleted. An attribute
        without a value deletes every value of that attribute.
        """
        return self._call(P.delete_attributes_params(domain, item, attributes), parsers.parse_empty)

    def batch_delete_attributes(self, domain, items):
        return self._call(P.batch_params('BatchDeleteAttributes', domain, items), parsers.parse_empty)

    def get_attributes(self, domain, item, attribute_name=None, consistent_read=False):
        """
        Returns the attributes associated with the item, or only the values of
        `attribute_name` when it is given.

        If the item does not exist, an empty list is returned. An error is not
        raised because SimpleDB provides no guarantee that the item does not
        exist on another replica; use `consistent_read` when that matters.
        """
        return self._call(P.get_attributes_params(domain, item, attribute_name, consistent_read),
                          parsers.parse_get_attributes)

    def select(self, expression, next_token=None, consistent_read=False):
        """
        Runs a select expression, either a string or a `Query`. Returns a
        page of `Item` objects; follow `next_token` for the rest.
        """
        return self._call(P.select_params(expression, next_token, consistent_read),
                          parsers.parse_select)
