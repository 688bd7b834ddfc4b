"""Lookup and dataset ingestion helpers for :mod:`ifsc_bharat`."""
