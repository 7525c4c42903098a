"""Paywall offer core: price-per-period normalization and placeholder tokens."""
