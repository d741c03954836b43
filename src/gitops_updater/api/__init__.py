"""HTTP API for gitops-updater."""
