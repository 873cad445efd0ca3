"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Services hold the business rules around chests and their collaborators.
    They receive repositories through the constructor and never commit;
    the request-scoped session decides when a unit of work ends.
    """

    pass
