from src.cli_scan import main


if __name__ == "__main__":
    raise SystemExit(main())
