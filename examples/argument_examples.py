import logging
from enum import Enum
from pathlib import Path

from commander import Argument, Flag, Option, Options, command
from commander.utils import setup_logging

setup_logging(console_log_level=logging.WARNING, log_filename=None)


class Place(Enum):
    """Enum for different places."""

    NEW_YORK = "New York"
    SAN_FRANCISCO = "San Francisco"
    LONDON = "London"

    def __str__(self):
        return self.value


@command(
    Argument("service", description="Service name to deploy."),
    Option("place", Place.NEW_YORK, description="Deployment location."),
    Option("path", None, type=Path, description="Path to the service source."),
    Options("numbers", [], count=3, type=int, description="Three build numbers."),
    Flag("verbose", flag="v", description="Print what is being deployed."),
)
def deploy(
    service: str, place: Place, path: Path | None, numbers: list[int], verbose: bool
) -> None:
    """Deploy a service."""
    joined = "|".join(str(number) for number in numbers)
    if verbose:
        print(f"Deploying {service}:{joined} to {place} from {path}...")
    print(f"{service}:{joined} deployed to {place} from {path}.")


if __name__ == "__main__":
    deploy.run()
