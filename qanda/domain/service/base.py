"""Base class for domain services."""


class Service:
    """Base for the domain services.

    Services own the rules that span entities: the vote ledger, tallies,
    feeds and ownership checks. They receive repositories and other services
    through their constructors and are request scoped.
    """

    pass
