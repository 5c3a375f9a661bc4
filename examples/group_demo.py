from commander import Argument, ArgumentConvertible, Flag, Group, Option


class Version(ArgumentConvertible):
    """A `major.minor` version string."""

    def __init__(self, major: int, minor: int):
        self.major = major
        self.minor = minor

    @classmethod
    def from_string(cls, value: str) -> "Version":
        major, minor = value.split(".")
        return cls(int(major), int(minor))

    def __str__(self):
        return f"{self.major}.{self.minor}"


tool = Group()


@tool.command("release", Argument("version", type=Version), Flag("dry-run", flag="n"))
def release(version: Version, dry_run: bool) -> None:
    prefix = "[dry run] " if dry_run else ""
    print(f"{prefix}Releasing {version}")


db = tool.group("db")


@db.command("migrate", Option("steps", 1, description="Migrations to apply"))
def migrate(steps: int) -> None:
    print(f"Applying {steps} migration(s)")


if __name__ == "__main__":
    tool.run()
