"""
Builders for the flat query parameters of SimpleDB actions. Every builder
returns a list of ``(name, value)`` tuples; list positions become 1-based
indices in the parameter names, in the order the caller supplied them.
"""
import re

from simpledb.entities import Item, as_attributes


__all__ = ['boolean', 'attribute_params', 'item_params', 'items_from_params', 'list_domains_params',
           'put_attributes_params', 'delete_attributes_params', 'get_attributes_params',
           'select_params', 'batch_params', 'domain_params']


def boolean(value):
    return 'true' if value else 'false'


def _name(obj):
    # Domains and items may be passed as objects or plain names.
    return getattr(obj, 'name', obj)


def attribute_params(attributes, prefix=''):
    params = []
    for idx, attribute in enumerate(as_attributes(attributes), 1):
        params.append(('%sAttribute.%d.Name' % (prefix, idx), attribute.name))
        # DeleteAttributes takes a bare name to delete every value.
        if attribute.value is not None:
            params.append(('%sAttribute.%d.Value' % (prefix, idx), attribute.value))
        if attribute.replace is not None:
            params.append(('%sAttribute.%d.Replace' % (prefix, idx), boolean(attribute.replace)))
    return params


def item_params(items):
    params = []
    for idx, item in enumerate(items, 1):
        if not isinstance(item, Item):
            item = Item(*item)
        prefix = 'Item.%d.' % idx
        params.append((prefix + 'ItemName', item.name))
        params.extend(attribute_params(item.attributes, prefix))
    return params


_ITEM_PARAM = re.compile(r'^Item\.(\d+)\.(?:ItemName|Attribute\.(\d+)\.(Name|Value|Replace))$')


def items_from_params(params):
    """
    Rebuilds the `Item` list encoded by `item_params`. Parameters that are
    not item parameters are ignored.
    """
    if isinstance(params, dict):
        params = params.items()
    names = {}
    attrs = {}
    for key, value in params:
        match = _ITEM_PARAM.match(key)
        if match is None:
            continue
        item_idx, attr_idx, field = match.groups()
        item_idx = int(item_idx)
        if attr_idx is None:
            names[item_idx] = value
        else:
            attrs.setdefault(item_idx, {}).setdefault(int(attr_idx), {})[field] = value

    items = []
    for item_idx in sorted(names):
        attributes = []
        for attr_idx, fields in sorted(attrs.get(item_idx, {}).items()):
            replace = fields.get('Replace')
            if replace is not None:
                replace = replace == 'true'
            attributes.append((fields.get('Name'), fields.get('Value'), replace))
        items.append(Item(names[item_idx], attributes))
    return items


def list_domains_params(max_number_of_domains=100, next_token=None):
    params = [
        ('Action', 'ListDomains'),
        ('MaxNumberOfDomains', str(max_number_of_domains)),
    ]
    if next_token is not None:
        params.append(('NextToken', next_token))
    return params


def put_attributes_params(domain, item, attributes):
    params = [
        ('Action', 'PutAttributes'),
        ('DomainName', _name(domain)),
        ('ItemName', _name(item)),
    ]
    return params + attribute_params(attributes)


def delete_attributes_params(domain, item, attributes=()):
    if isinstance(item, Item) and not attributes:
        attributes = item.attributes
    params = [
        ('Action', 'DeleteAttributes'),
        ('DomainName', _name(domain)),
        ('ItemName', _name(item)),
    ]
    return params + attribute_params(attributes or ())


def get_attributes_params(domain, item, attribute_name=None, consistent_read=False):
    params = [
        ('Action', 'GetAttributes'),
        ('DomainName', _name(domain)),
        ('ItemName', _name(item)),
        ('ConsistentRead', boolean(consistent_read)),
    ]
    if attribute_name is not None:
        params.append(('AttributeName', attribute_name))
    return params


def select_params(expression, next_token=None, consistent_read=False):
    if hasattr(expression, 'to_expression'):
        expression = expression.to_expression()
    params = [
        ('Action', 'Select'),
        ('SelectExpression', expression),
        ('ConsistentRead', boolean(consistent_read)),
    ]
    if next_token is not None:
        params.append(('NextToken', next_token))
    return params


def batch_params(action, domain, items):
    return [('Action', action), ('DomainName', _name(domain))] + item_params(items)


def domain_params(action, domain):
    return [('Action', action), ('DomainName', _name(domain))]
