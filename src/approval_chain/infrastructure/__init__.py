"""Infrastructure layer - technical concerns such as logging."""
