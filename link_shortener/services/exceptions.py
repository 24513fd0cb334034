"""
Exceptions raised by the URL service.

The application registers handlers that render these as
{"error": message} JSON responses with the matching status code.
"""


class ShortenerError(Exception):
    """Base class for URL service errors"""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingURLError(ShortenerError):
    """The required url field is missing or empty"""

    status_code = 400

    def __init__(self, message: str = 'The "url" field is required.'):
        super().__init__(message)


class ShortCodeNotFoundError(ShortenerError):
    """No mapping exists for the short code"""

    status_code = 404

    def __init__(self, short_code: str, message: str = "Short code not found."):
        self.short_code = short_code
        super().__init__(message)
