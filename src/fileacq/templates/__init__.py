"""Bundled templates written by `fileacq init`."""
