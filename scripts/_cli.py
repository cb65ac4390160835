"""Argument parsing shared by the command-line scripts."""
import argparse


class UsageError(Exception):
    """Bad command-line usage; the script reports it on its own stderr."""


class CommandParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of printing to sys.stderr and exiting."""

    def error(self, message):
        raise UsageError(message)
