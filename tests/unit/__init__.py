"""Unit tests for toolbox.

Layout mirrors `src/toolbox`: `domain/` covers the Outcome type, its
OrderedSet, events and errors; the top-level modules cover config and
logging. Everything here is in-memory and deterministic. The only environment
touched is `TOOLBOX_LOG_LEVEL`, always through `monkeypatch`.
"""
