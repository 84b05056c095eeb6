from simpledb.entities import Attribute, Domain, DomainMetadata, Item, Region
from simpledb.errors import APIError, EncodingError, ParseError, SimpleDBError, TransportError
from simpledb.query import Query, every, item_name, where
from simpledb.regions import REGIONS, get_region
from simpledb.signing import RequestSigner
from simpledb.simpledb import Result, SimpleDB


__all__ = ['SimpleDB', 'Result', 'RequestSigner', 'Region', 'REGIONS', 'get_region',
           'Attribute', 'Item', 'Domain', 'DomainMetadata', 'Query', 'where', 'every',
           'item_name', 'SimpleDBError', 'TransportError', 'APIError', 'ParseError',
           'EncodingError']
