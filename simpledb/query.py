"""
Builds SimpleDB select expressions.

    >>> q = Query('users').filter(where(name='Katie') | where(age__gt='25'))
    >>> q.order_by('-age').limit(10).to_expression()
    "SELECT * FROM `users` WHERE (name = 'Katie' OR age > '25') ORDER BY age DESC LIMIT 10"

Queries don't run themselves; pass them to `SimpleDB.select`.
"""


__all__ = ['where', 'every', 'item_name', 'Query']


QUERY_OPERATORS = {
    # Note that `is null`, `is not null` and `every` are handled specially by using
    # attr__eq = None, attr__noteq = None, and every(), respectively.
    'eq': '=',              # equals
    'noteq': '!=',          # not equals
    'gt': '>',              # greater than
    'gte': '>=',            # greater than or equals
    'lt': '<',              # less than
    'lte': '<=',            # less than or equals
    'like': 'like',         # contains, works with `%` globs: '%string' or 'string%'
    'notlike': 'not like',  # doesn't contain
    'btwn': 'between',      # falls within range (inclusive)
    'in': 'in',             # equal to one of
}


RESERVED_KEYWORDS = (
    'OR', 'AND', 'NOT', 'FROM', 'WHERE', 'SELECT', 'LIKE', 'NULL', 'IS', 'ORDER',
    'BY', 'ASC', 'DESC', 'IN', 'BETWEEN', 'INTERSECTION', 'LIMIT', 'EVERY',
)


def quote_name(s):
    if s.upper() in RESERVED_KEYWORDS:
        return '`%s`' % s
    return s


def quote_value(s):
    return "'%s'" % s.replace("'", "''")


class where(object):
    """
    Encapsulate where clause as objects that can be combined logically using
    & and |.
    """

    # Connection types
    AND = 'AND'
    OR = 'OR'
    default = AND

    def __init__(self, *args, **query):
        self.connector = self.default
        self.children = []
        self.children.extend(args)
        for key, value in query.items():
            if '__' in key:
                parts = key.split('__')
                if len(parts) != 2:
                    raise ValueError("Filter arguments should be of the form "
                        "`field__operation`")
                field, operation = parts
            else:
                field, operation = key, 'eq'
            self._add_condition(field, operation, value)

    def _add_condition(self, field, operation, value):
        if operation not in QUERY_OPERATORS:
            raise ValueError('%s is not a valid query operation' % (operation,))
        if operation == 'btwn' and len(value) != 2:
            raise ValueError('Invalid value `%s` for between clause. Requires two item list.' % (value,))
        self.children.append((field, operation, value))

    def __len__(self):
        return len(self.children)

    def to_expression(self):
        """
        Returns the query expression for the where clause. Returns an empty
        string if the node is empty.
        """
        where = []
        for child in self.children:
            if hasattr(child, 'to_expression'):
                expr = child.to_expression()
                if expr:
                    where.append('(%s)' % expr)
            else:
                field, operation, value = child
                operator = QUERY_OPERATORS[operation]
                make = getattr(self, '_make_%s_condition' % operation, self._make_condition)
                where.append(make(field, operator, value))
        conn_str = ' %s ' % self.connector
        return conn_str.join(where)

    def add(self, other, conn):
        """
        Adds a new clause to the where statement. If the connector type is the
        same as the root's current connector type, the clause is added to the
        first level. Otherwise, the whole tree is pushed down one level and a
        new root connector is created, connecting the existing clauses and the
        new clause.
        """
        if other in self.children and conn == self.connector:
            return
        if len(self.children) < 2:
            self.connector = conn
        if self.connector == conn:
            if type(other) is type(self) and (other.connector == conn or len(other) <= 1):
                self.children.extend(other.children)
            else:
                self.children.append(other)
        else:
            obj = self._clone()
            self.connector = conn
            self.children = [obj, other]

    def _attribute(self, attribute):
        return quote_name(attribute)

    def _make_condition(self, attribute, operation, value):
        return '%s %s %s' % (self._attribute(attribute), operation, quote_value(value))

    def _make_eq_condition(self, attribute, operation, value):
        if value is None:
            return '%s IS NULL' % self._attribute(attribute)
        return self._make_condition(attribute, operation, value)

    def _make_noteq_condition(self, attribute, operation, value):
        if value is None:
            return '%s IS NOT NULL' % self._attribute(attribute)
        return self._make_condition(attribute, operation, value)

    def _make_in_condition(self, attribute, operation, value):
        return '%s %s(%s)' % (self._attribute(attribute), operation,
                              ', '.join(quote_value(v) for v in value))

    def _make_btwn_condition(self, attribute, operation, value):
        return '%s between %s and %s' % (self._attribute(attribute),
                                         quote_value(value[0]), quote_value(value[1]))

    def _clone(self):
        obj = self.__class__()
        obj.connector = self.connector
        obj.children = self.children[:]
        return obj

    def _combine(self, other, conn):
        if not isinstance(other, where):
            raise TypeError(other)
        if type(self) is where:
            obj = self._clone()
        else:
            # Keep every()/item_name() conditions in their own group.
            obj = where()
            if len(self):
                obj.children.append(self._clone())
        obj.add(other, conn)
        return obj

    def __or__(self, other):
        return self._combine(other, self.OR)

    def __and__(self, other):
        return self._combine(other, self.AND)


class every(where):
    """
    Encapsulates a where clause and uses the every() operator which,
    for multi-valued attributes, checks that every attribute satisfies
    the constraint.
    """
    def _attribute(self, attribute):
        return 'every(%s)' % quote_name(attribute)


class item_name(where):
    """
    Encapsulates a where clause that filters based on item names.
    """
    def __init__(self, *equals, **query):
        self.connector = self.default
        self.children = []
        for equal in equals:
            self._add_condition('itemName()', 'eq', equal)
        for operation, value in query.items():
            self._add_condition('itemName()', operation, value)


class Query(object):

    DESCENDING = 'DESC'
    ASCENDING = 'ASC'

    def __init__(self, domain):
        self.domain = getattr(domain, 'name', domain)
        self.where = where()
        self.fields = []
        self.max_items = None
        self.order = None

    def __repr__(self):
        return '<%s: %s>' % (self.__class__.__name__, self.to_expression())

    def all(self):
        return self._clone()

    def limit(self, limit):
        q = self._clone()
        q.max_items = limit
        return q

    def filter(self, *args, **kwargs):
        q = self._clone()
        q.where = self.where & where(*args, **kwargs)
        return q

    def values(self, *fields):
        q = self._clone()
        q.fields = list(fields)
        return q

    def item_names(self):
        q = self._clone()
        q.fields = ['itemName()']
        return q

    def count(self):
        q = self._clone()
        q.fields = ['count(*)']
        return q

    def order_by(self, field):
        q = self._clone()
        if field[0] == '-':
            field = field[1:]
            q.order = (field, self.DESCENDING)
        else:
            q.order = (field, self.ASCENDING)
        return q

    def to_expression(self):
        """
        Creates the query expression for this query. Returns the expression
        string.
        """
        if self.fields:
            output_list = [quote_name(f) for f in self.fields]
        else:
            output_list = ['*']
        stmt = ['SELECT', ', '.join(output_list), 'FROM', '`%s`' % self.domain]
        if len(self.where):
            stmt.extend(['WHERE', self.where.to_expression()])
        if self.order is not None:
            stmt.extend(['ORDER BY', quote_name(self.order[0]), self.order[1]])
        if self.max_items is not None:
            stmt.append('LIMIT %s' % self.max_items)
        return ' '.join(stmt)

    def _clone(self):
        q = self.__class__(self.domain)
        q.where = self.where._clone()
        q.fields = self.fields[:]
        q.order = self.order
        q.max_items = self.max_items
        return q
