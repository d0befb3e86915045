"""Pure layout rules: names, packages, manifests. No I/O."""
