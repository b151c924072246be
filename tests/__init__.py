"""Test suite for the Monkey front end."""
