"""jotter - a journal kept in monthly markdown files."""
