"""
Decoding of SimpleDB XML responses.

Each parser takes the root element of a successful response and returns the
value for the action, raising `ParseError` when an expected element is
missing. `parse_response` picks between the error envelope and the success
parser.
"""
import base64
import binascii
import datetime
import xml.etree.ElementTree as ET

from simpledb.entities import Attribute, Domain, DomainMetadata, Item
from simpledb.errors import APIError, ParseError


NS = 'http://sdb.amazonaws.com/doc/2009-04-15/'


def _tag(name):
    return '{%s}%s' % (NS, name)


def _required(node, name):
    child = node.find(_tag(name))
    if child is None:
        raise ParseError('Missing <%s> in <%s>' % (name, node.tag[len(NS) + 2:]))
    return child


def _text(node):
    if node.get('encoding') == 'base64':
        try:
            return base64.b64decode(node.text or '').decode('utf-8')
        except (binascii.Error, UnicodeDecodeError) as e:
            raise ParseError('Invalid base64 value: %s' % e)
    return node.text or ''


def _result(root, action):
    return _required(root, '%sResult' % action)


def _next_token(result):
    token = result.find(_tag('NextToken'))
    if token is None:
        return None
    return token.text


def _parse_attributes(node):
    # `node` contains <Attribute> children.
    attributes = []
    for attribute in node.findall(_tag('Attribute')):
        name = _text(_required(attribute, 'Name'))
        value = _text(_required(attribute, 'Value'))
        attributes.append(Attribute(name, value))
    return attributes


def parse_empty(root, action):
    return None, None


def parse_list_domains(root, action):
    result = _result(root, action)
    domains = [Domain(d.text) for d in result.findall(_tag('DomainName'))]
    return domains, _next_token(result)


def parse_get_attributes(root, action):
    return _parse_attributes(_result(root, action)), None


def parse_select(root, action):
    result = _result(root, action)
    items = []
    for item in result.findall(_tag('Item')):
        name = _text(_required(item, 'Name'))
        items.append(Item(name, _parse_attributes(item)))
    return items, _next_token(result)


METADATA_FIELDS = (
    ('ItemCount', 'item_count'),
    ('ItemNamesSizeBytes', 'item_names_size_bytes'),
    ('AttributeNameCount', 'attribute_name_count'),
    ('AttributeNamesSizeBytes', 'attribute_names_size_bytes'),
    ('AttributeValueCount', 'attribute_value_count'),
    ('AttributeValuesSizeBytes', 'attribute_values_size_bytes'),
    ('Timestamp', 'timestamp'),
)


def parse_domain_metadata(root, action):
    result = _result(root, action)
    values = {}
    for tag, field in METADATA_FIELDS:
        text = _required(result, tag).text
        try:
            values[field] = int(text)
        except (TypeError, ValueError):
            raise ParseError('Invalid <%s> value: %r' % (tag, text))
    try:
        values['timestamp'] = datetime.datetime.fromtimestamp(values['timestamp'], datetime.timezone.utc)
    except (OverflowError, OSError, ValueError):
        raise ParseError('Invalid <Timestamp> value: %r' % (values['timestamp'],))
    return DomainMetadata(**values), None


def parse_metadata(root):
    """Returns the ``(request id, box usage)`` pair of a successful response."""
    meta = root.find(_tag('ResponseMetadata'))
    if meta is None:
        return None, None
    return meta.findtext(_tag('RequestId')), meta.findtext(_tag('BoxUsage'))


def parse_error(root, status=None):
    """
    Returns an `APIError` for an ``<Response><Errors><Error>`` envelope, or
    ``None`` if `root` isn't one.
    """
    if root.tag != 'Response':
        return None
    error = root.find('Errors/Error')
    if error is None or error.findtext('Code') is None:
        return None
    return APIError(error.findtext('Code'), error.findtext('Message'), status=status,
                    box_usage=error.findtext('BoxUsage'), request_id=root.findtext('RequestID'))


def parse_response(content, action, parser, status=None):
    """
    Decodes the body of a SimpleDB response.

    Returns ``(value, next_token, request_id, box_usage)`` on success. Raises
    `APIError` for an error envelope and `ParseError` for anything else the
    service should not have sent.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise ParseError('Response is not valid XML: %s' % e, status=status, content=content)

    error = parse_error(root, status)
    if error is not None:
        raise error

    if root.tag != _tag('%sResponse' % action):
        raise ParseError('Unexpected response element %s for %s' % (root.tag, action),
                         status=status, content=content)
    if status is not None and not 200 <= status < 300:
        raise ParseError('HTTP %s with a success body for %s' % (status, action),
                         status=status, content=content)
    try:
        value, next_token = parser(root, action)
    except ParseError as e:
        e.status, e.content = status, content
        raise
    request_id, box_usage = parse_metadata(root)
    return value, next_token, request_id, box_usage
