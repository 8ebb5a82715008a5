"""Kida templates for the docs shell.

``templates/quire/shell.html`` holds the two-pane layout; its
``content`` block is rendered alone for partial navigation.
"""
