"""LocalizableChecker - find unused keys of a .strings resource file in a project tree."""
