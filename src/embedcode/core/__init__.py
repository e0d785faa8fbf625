"""Runtime plumbing shared by the fragmenter, the embedder and the CLI."""
