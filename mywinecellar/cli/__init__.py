"""Command line tools for MyWineCellar."""
