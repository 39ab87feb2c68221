"""Routing model — declared routes, their parameters, and the collection
that declaration files populate.

Nothing here dispatches requests. Routes are declared, parsed into
``RouteDefinition`` records, and audited.
"""
