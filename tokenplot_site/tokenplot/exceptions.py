class TokenPlotError(Exception):
    """Base error for the tokenize/plot/predict pipeline."""

    default_message = "Could not process the sentence."

    def __init__(self, message: str = ""):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(TokenPlotError):
    """Input rejected before anything is recorded."""

    default_message = "Invalid input."


class MissingInputError(InvalidInputError):
    default_message = "Please enter a sentence."


class EmptyTokenizationError(InvalidInputError):
    default_message = "The sentence has no words to tokenize."
