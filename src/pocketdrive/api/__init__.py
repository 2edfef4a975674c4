# PocketDrive HTTP API layer
# Created: 2026-10-19
#
# Versioned REST endpoints mounted at /api/v1/, with the files endpoint also
# reachable at /api/files for clients of the original route.
