"""NetCalc server startup package."""
