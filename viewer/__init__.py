"""Core (UI-agnostic) dataset viewer logic.

This package contains:
- CSV / JSONL parsing into row records
- column model, pagination and resize state for the table
- cell inspector state
- the dataset repository over a key/value store
- catalog filters and the mock evaluation leaderboard (Altair -> Vega-Lite spec dict)
"""
