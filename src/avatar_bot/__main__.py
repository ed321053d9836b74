"""Allow ``python -m avatar_bot``."""

from avatar_bot.main import main

if __name__ == "__main__":
    main()
