import typing, dataclasses

from .common import CliArgsException, file_load_yaml, file_dump_yaml


@dataclasses.dataclass
class CliArgsConfig:
    skip_program: bool = True
    suggest:      bool = True
    debug:        bool = False

    @staticmethod
    def from_dict(d: dict):
        """ Create a CliArgsConfig object from a dictionary whose keys are a
            subset of the fields of CliArgsConfig. Missing keys keep their
            defaults; unknown keys are an error. """
        r = CliArgsConfig()

        names = [ field.name for field in dataclasses.fields(CliArgsConfig) ]
        for k, v in (d or {}).items():
            if k not in names:
                raise CliArgsException(f"Unknown configuration option '{k}'. Valid options are: {', '.join(names)}.")
            if not isinstance(v, bool):
                raise CliArgsException(f"Configuration option '{k}' must be true or false, got {v!r}.")
            setattr(r, k, v)

        return r

    def items(self) -> typing.Iterable[typing.Tuple[str, typing.Any]]:
        return dataclasses.asdict(self).items()

    def __str__(self) -> str:
        """ Returns a string like "skip_program=Yes & suggest=Yes & debug=No" """
        return ' & '.join([ f"{k}={'Yes' if v else 'No'}" for k, v in self.items() ])


def load_config(filepath: str) -> CliArgsConfig:
    d = file_load_yaml(filepath)

    if d is not None and not isinstance(d, dict):
        raise CliArgsException(f'Configuration file "{filepath}" must hold a mapping.')

    return CliArgsConfig.from_dict(d)


def dump_config(filepath: str, config: CliArgsConfig) -> None:
    file_dump_yaml(filepath, dict(config.items()))


gCFG: CliArgsConfig = CliArgsConfig()

def CFG() -> CliArgsConfig:
    # pylint: disable=global-variable-not-assigned
    global gCFG
    return gCFG
