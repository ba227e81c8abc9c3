"""Exceptions raised while building and playing a board."""


class JeopardyError(Exception):
    """Base class for board errors."""

    pass


class RunError(JeopardyError):
    """A run could not produce a complete board."""

    pass


class InsufficientPoolError(RunError):
    """The category pool is smaller than the number of categories requested."""

    def __init__(self, available: int, requested: int):
        self.available = available
        self.requested = requested
        super().__init__(f"Category pool has {available} categories, {requested} requested")


class CategoryFetchError(RunError):
    """A category could not be turned into a column of clues."""

    pass


class TriviaSourceError(CategoryFetchError):
    """The trivia API failed or returned something unusable."""

    pass


class CategoryUnavailableError(CategoryFetchError):
    """The trivia API has no clues for a category."""

    def __init__(self, category_id: int, reason: str = "no clues returned"):
        self.category_id = category_id
        super().__init__(f"Category {category_id} unavailable: {reason}")


class InsufficientCluesError(CategoryFetchError):
    """A category has fewer clues than a column needs."""

    def __init__(self, category_id: int, available: int, required: int):
        self.category_id = category_id
        self.available = available
        self.required = required
        super().__init__(f"Category {category_id} has {available} usable clues, {required} required")


class RunInProgressError(JeopardyError):
    """A new run was requested while another is still loading."""

    pass


class BoardNotReadyError(JeopardyError):
    """A cell was revealed before any board was loaded."""

    pass


class InvalidCellError(JeopardyError, IndexError):
    """A cell reference does not point at a clue on the current board."""

    pass
