"""TubeSearch - search YouTube and embed the results."""
