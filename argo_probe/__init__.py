"""Liveness and pipeline-check HTTP service."""
