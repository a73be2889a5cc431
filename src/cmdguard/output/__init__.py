"""Reporters — hook JSON and Rich terminal output."""
