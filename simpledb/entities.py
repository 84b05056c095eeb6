from collections import namedtuple


__all__ = ['Region', 'Attribute', 'Item', 'Domain', 'DomainMetadata', 'as_attributes']


Region = namedtuple('Region', ['display_name', 'endpoint'])


class Attribute(namedtuple('Attribute', ['name', 'value', 'replace'])):
    """
    A single name/value pair. `replace` is ``True`` to overwrite the existing
    values of the attribute, ``False`` to append, or ``None`` to leave the
    choice to SimpleDB (which appends).
    """
    __slots__ = ()

    def __new__(cls, name, value, replace=None):
        return super(Attribute, cls).__new__(cls, name, value, replace)


def as_attributes(attributes, replace=None):
    """
    Normalizes `attributes` into a tuple of `Attribute`. Accepts a sequence
    of `Attribute` objects or ``(name, value[, replace])`` tuples, or a
    dictionary of names -> values where a list value stands for several
    values of the same attribute.
    """
    if isinstance(attributes, str):
        raise TypeError('Attributes must be a sequence or a dictionary, not %r' % (attributes,))
    if hasattr(attributes, 'items'):
        attrs = []
        for name, values in attributes.items():
            if not isinstance(values, (list, tuple)):
                values = [values]
            for value in values:
                attrs.append(Attribute(name, value, replace))
        return tuple(attrs)
    attrs = []
    for attribute in attributes:
        if isinstance(attribute, Attribute):
            attrs.append(attribute)
        elif isinstance(attribute, (list, tuple)):
            attrs.append(Attribute(*attribute))
        else:
            raise TypeError('Expected an Attribute or a (name, value) tuple, not %r' % (attribute,))
    return tuple(attrs)


class Item(namedtuple('Item', ['name', 'attributes'])):
    __slots__ = ()

    def __new__(cls, name, attributes=()):
        return super(Item, cls).__new__(cls, name, as_attributes(attributes))

    @classmethod
    def from_dict(cls, name, attributes, replace=None):
        """
        Builds an item from a dictionary of attribute names -> values. A list
        value is stored as several values of the same attribute.
        """
        return cls(name, as_attributes(attributes, replace))

    def to_dict(self):
        # Multi-valued attributes are coalesced into lists.
        attributes = {}
        for attr in self.attributes:
            if attr.name in attributes:
                if isinstance(attributes[attr.name], list):
                    attributes[attr.name].append(attr.value)
                else:
                    attributes[attr.name] = [attributes[attr.name], attr.value]
            else:
                attributes[attr.name] = attr.value
        return attributes


Domain = namedtuple('Domain', ['name'])


DomainMetadata = namedtuple('DomainMetadata', [
    'item_count',
    'item_names_size_bytes',
    'attribute_name_count',
    'attribute_names_size_bytes',
    'attribute_value_count',
    'attribute_values_size_bytes',
    'timestamp',
])
