"""Serverless endpoint storing holidays for the schedule display."""
