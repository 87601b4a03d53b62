"""Filesystem and git helpers used by the provisioner."""
