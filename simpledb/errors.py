__all__ = ['SimpleDBError', 'TransportError', 'APIError', 'ParseError', 'EncodingError']


class SimpleDBError(Exception): pass


class TransportError(SimpleDBError):
    """The HTTP request could not be completed."""

    def __init__(self, message, cause=None):
        super(TransportError, self).__init__(message)
        self.cause = cause


class APIError(SimpleDBError):
    """
    SimpleDB answered with an error envelope. `code` is the AWS error code
    (``NoSuchDomain``, ``InvalidParameterValue``...).
    """

    def __init__(self, code, message, status=None, box_usage=None, request_id=None):
        super(APIError, self).__init__('%s: %s' % (code, message))
        self.code = code
        self.message = message
        self.status = status
        self.box_usage = box_usage
        self.request_id = request_id


class ParseError(SimpleDBError):
    """The response body was neither the expected result nor an error envelope."""

    def __init__(self, message, status=None, content=None):
        super(ParseError, self).__init__(message)
        self.status = status
        self.content = content


class EncodingError(SimpleDBError): pass
