"""Simple entrypoint to run the capsule engine's evaluation scenarios locally."""

from capsule_app.logging_config import configure_logging
from evaluation.harness import run_smoke_checks


def main() -> None:
    configure_logging()
    for line in run_smoke_checks():
        print(line)


if __name__ == "__main__":
    main()
