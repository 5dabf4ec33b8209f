"""Tools for building FTP upload sessions, navigation trees and renaming site files."""

__version__ = "0.2.0"