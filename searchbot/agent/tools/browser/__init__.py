"""Headless browser helpers shared by browser-driven tools."""
