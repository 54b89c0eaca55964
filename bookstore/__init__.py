"""Bookstore catalog seeding and query toolkit for MongoDB."""
