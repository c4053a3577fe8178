"""Version 1 of the Autoservice API."""
