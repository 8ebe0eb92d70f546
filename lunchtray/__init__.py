"""Lunch Tray ordering flow for the terminal."""
