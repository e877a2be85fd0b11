"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Services hold the operations that span a post and the comment forest
    stored inside it. They are built per request and keep no state beyond
    their collaborators.
    """
