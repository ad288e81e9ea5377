"""Domain-level exceptions."""


class RepositoryError(Exception):
    """
    Raised when the persistent store is unreachable or rejects an operation.
    
    The original driver/ORM exception is chained as __cause__.
    """
