class PastesError(Exception):
    """Base class for errors which abort an upload.

    The message is shown to the user as-is, so it should say which stage
    failed and why.
    """


class InputReadError(PastesError):
    pass


class ContentTypeError(PastesError):
    pass


class ConfigError(PastesError):
    pass


class TransportError(PastesError):
    pass


class ResponseError(PastesError):

    def __init__(self, message, status_code=None, body=None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    def __str__(self):
        message = super().__str__()
        if self.status_code is not None:
            message += ' (status code {})'.format(self.status_code)
        if self.body:
            message += ':\n' + self.body
        return message


class HeaderError(PastesError):
    pass
