"""
Event extraction — the Event Fetcher collaborator.

Modules:
  sql_clauses      : Pure functions for SQL WHERE clause construction.
  query_builder    : Keyset-paginated SELECT over the downtime events table.
  event_repository : Query execution, pagination loop, DataFrame assembly.
  demo_events      : Deterministic synthetic events for demo mode.
  event_fetcher    : Fetcher protocol + database / demo implementations.
"""
