"""Entry point for the interactive log service client."""

from logclient.app import main


if __name__ == "__main__":
    main()
