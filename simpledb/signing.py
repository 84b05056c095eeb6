import base64
import hashlib
import hmac
import time
from urllib.parse import quote

from simpledb.errors import EncodingError


__all__ = ['RequestSigner', 'SignatureMethod_HMAC_SHA1', 'SignatureMethod_HMAC_SHA256',
           'escape', 'urlencode', 'canonical_query_string', 'string_to_sign']


SERVICE_VERSION = '2009-04-15'
EXPIRES_FORMAT = '%Y-%m-%dT%H:%M:%SZ'


def generate_expires(clock, expires_in):
    return time.strftime(EXPIRES_FORMAT, time.gmtime(clock() + expires_in))


def _utf8_str(s):
    # Parameter values must end up as UTF-8 text on the wire.
    if isinstance(s, bool):
        return 'true' if s else 'false'
    if isinstance(s, bytes):
        try:
            return s.decode('utf-8')
        except UnicodeDecodeError as e:
            raise EncodingError('Parameter is not valid UTF-8: %r (%s)' % (s, e))
    if isinstance(s, int):
        return str(s)
    if not isinstance(s, str):
        raise EncodingError('Cannot encode parameter of type %s: %r' % (type(s).__name__, s))
    try:
        s.encode('utf-8')
    except UnicodeEncodeError as e:
        raise EncodingError('Parameter is not representable as UTF-8: %r (%s)' % (s, e))
    return s


def escape(s):
    """Percent-encodes `s` keeping only the RFC 3986 unreserved characters."""
    return quote(_utf8_str(s).encode('utf-8'), safe='-_.~')


def urlencode(d):
    if isinstance(d, dict):
        d = d.items()
    return '&'.join(['%s=%s' % (escape(k), escape(v)) for k, v in d])


def canonical_query_string(params):
    """
    Returns the query string used for signing: parameters sorted by the
    UTF-8 bytes of their names (ties keep their original order) and
    percent-encoded.
    """
    if isinstance(params, dict):
        params = params.items()
    params = [(_utf8_str(k), _utf8_str(v)) for k, v in params if k != 'Signature']
    return urlencode(sorted(params, key=lambda p: p[0].encode('utf-8')))


def string_to_sign(method, host, query_string, path='/'):
    return '\n'.join((method.upper(), host.lower(), path, query_string))


class SignatureMethod(object):

    @property
    def name(self):
        raise NotImplementedError

    digestmod = None
    version = '2'

    def build_signature(self, base, aws_secret):
        hashed = hmac.new(_utf8_str(aws_secret).encode('utf-8'), base.encode('utf-8'), self.digestmod)
        return base64.b64encode(hashed.digest()).decode('ascii')


class SignatureMethod_HMAC_SHA1(SignatureMethod):
    name = 'HmacSHA1'
    digestmod = hashlib.sha1


class SignatureMethod_HMAC_SHA256(SignatureMethod):
    name = 'HmacSHA256'
    digestmod = hashlib.sha256


class RequestSigner(object):
    """
    Signs SimpleDB query requests with AWS Signature Version 2.

    `clock` returns the current POSIX time; requests expire `expires_in`
    seconds after it. The signer keeps no state between calls, so a single
    instance can be shared freely.
    """

    def __init__(self, aws_key, aws_secret, clock=time.time, expires_in=600,
                 signature_method=SignatureMethod_HMAC_SHA1, version=SERVICE_VERSION):
        self.aws_key = aws_key
        self.aws_secret = aws_secret
        self.clock = clock
        self.expires_in = expires_in
        self.signature_method = signature_method()
        self.version = version

    def auth_parameters(self):
        return [
            ('Expires', generate_expires(self.clock, self.expires_in)),
            ('AWSAccessKeyId', self.aws_key),
            ('Version', self.version),
            ('SignatureVersion', self.signature_method.version),
            ('SignatureMethod', self.signature_method.name),
        ]

    def sign(self, method, host, params):
        """
        Returns ``Signature=<signature>&<canonical query string>`` for a request
        with `params` sent to `host`. Raises `EncodingError` if a parameter
        can't be represented as UTF-8 text.
        """
        if isinstance(params, dict):
            params = list(params.items())
        query = canonical_query_string(list(params) + self.auth_parameters())
        base = string_to_sign(method, host, query)
        signature = self.signature_method.build_signature(base, self.aws_secret)
        return 'Signature=%s&%s' % (escape(signature), query)
