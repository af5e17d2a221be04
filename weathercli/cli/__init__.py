"""CLI module for weathercli."""
