"""
Infrastructure adapters for the orders bounded context.

Each adapter implements a domain port (ABC) and connects
to an external system: the SQL order store or the SMTP server.
"""
