from models.rest import SubmitOutcome


class ComposerError(Exception):
    outcome: SubmitOutcome = SubmitOutcome.UNEXPECTED
    detail: str = ""

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.detail
        super().__init__(self.detail)


class ContentTypeMissingError(ComposerError):
    outcome = SubmitOutcome.CONTENT_TYPE_MISSING
    detail = "Please select a content type."


class MalformedUrlError(ComposerError):
    outcome = SubmitOutcome.MALFORMED_URL
    detail = "The URL is malformed. Please change the URL and try again."


class UnexpectedError(ComposerError):
    outcome = SubmitOutcome.UNEXPECTED

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"An unexpected error occurred: {reason}")

    @classmethod
    def from_exception(cls, exc: BaseException) -> "UnexpectedError":
        return cls(str(exc) or type(exc).__name__)
