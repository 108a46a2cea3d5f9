"""Allow ``python -m component_builder``."""

from component_builder.cli import main

if __name__ == "__main__":
    main()
