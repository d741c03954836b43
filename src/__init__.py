"""GitOps Updater - automated YAML updates delivered through Git hosting APIs."""
