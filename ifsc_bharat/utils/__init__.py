"""Shared helpers for :mod:`ifsc_bharat`."""
