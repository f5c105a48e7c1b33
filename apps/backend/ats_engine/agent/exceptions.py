class ServiceError(RuntimeError):
    """Raised when the generative analysis service is unreachable, times out or fails"""


class ParseError(ValueError):
    """Raised when the generative analysis service returns an unusable payload.

    Covers empty responses, text that is not a JSON object, and objects that
    are missing the fields the engine needs (a numeric overall score and a
    list of suggestions).
    """
