"""Tests for tictac."""
