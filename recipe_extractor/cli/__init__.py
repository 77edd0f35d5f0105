"""Recipe Extractor command line interface."""
