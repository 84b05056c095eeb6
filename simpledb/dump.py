"""
Copies SimpleDB domains to and from JSON documents of the form
``{item name: {attribute name: value or [values]}}``.

These helpers raise `SimpleDBError` on the first failed call.
"""
import logging

import simplejson

from simpledb.entities import Item
from simpledb.query import Query


__all__ = ['sdbdump', 'sdbimport', 'sdbcopy', 'BATCH_SIZE']


log = logging.getLogger(__name__)


# Max items per BatchPutAttributes call.
BATCH_SIZE = 25


def iter_items(sdb, domain, consistent_read=False):
    expression = Query(domain).to_expression()
    next_token = None
    while True:
        result = sdb.select(expression, next_token=next_token, consistent_read=consistent_read)
        for item in result.unwrap():
            yield item
        next_token = result.next_token
        if next_token is None:
            break


def has_domain(sdb, domain):
    domain = getattr(domain, 'name', domain)
    next_token = None
    while True:
        result = sdb.list_domains(next_token=next_token)
        if domain in [d.name for d in result.unwrap()]:
            return True
        next_token = result.next_token
        if next_token is None:
            return False


def sdbdump(sdb, domain):
    items = dict((item.name, item.to_dict()) for item in iter_items(sdb, domain))
    log.info('Dumped %d items from %s', len(items), domain)
    return simplejson.dumps(items)


def sdbimport(sdb, domain, items):
    # If the domain doesn't exist, create it.
    if not has_domain(sdb, domain):
        log.info('Creating domain %s', domain)
        sdb.create_domain(domain).unwrap()

    items = [Item.from_dict(name, attributes, replace=True) for name, attributes in items.items()]
    for i in range(0, len(items), BATCH_SIZE):
        sdb.batch_put_attributes(domain, items[i:i + BATCH_SIZE]).unwrap()
    log.info('Imported %d items into %s', len(items), domain)


def sdbcopy(sdb, from_domain, to_domain):
    json = sdbdump(sdb, from_domain)
    sdbimport(sdb, to_domain, simplejson.loads(json))
