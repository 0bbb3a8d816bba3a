"""Tests for the econet24 client."""
