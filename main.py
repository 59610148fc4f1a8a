from quotepush.core.runner import main as run_main


def main() -> None:
    # Delegate to runner.main which contains the command loop.
    run_main()


if __name__ == "__main__":
    main()
