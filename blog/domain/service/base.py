"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold comment-subsystem rules that span several entities,
    such as thread assembly or notification fan-out.
    """

    pass
