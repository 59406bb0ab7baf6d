"""Gradebook: students, courses and marks over a relational store."""
