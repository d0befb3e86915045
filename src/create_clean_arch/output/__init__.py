"""Human and JSON rendering of service results."""
