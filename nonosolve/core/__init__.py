"""Grid types and puzzle IO."""
