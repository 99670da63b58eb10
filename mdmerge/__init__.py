"""mdmerge - check and merge multi-file markdown documents."""
