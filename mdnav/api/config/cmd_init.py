"""Write a default configuration file."""

from collections.abc import Iterator

from .._output_schemas.config import ConfigInitOutput
from ..StageResult import StageResult
from .MdnavConfig import MdnavConfig


def cmd_init(force: bool = False) -> StageResult:
    """Create the config file with default settings.

    Args:
        force: Overwrite an existing file
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        path = MdnavConfig.get_config_path()
        yield (0.3, "Checking for existing configuration...")
        if path.exists() and not force:
            yield (1.0, "Complete")
            result_obj.output = ConfigInitOutput(
                config_path=str(path),
                written=False,
                errors=[f"{path} already exists (use --force to overwrite)"],
            ).model_dump(mode="python")
            result_obj.result = f"Config already exists: {path}"
            result_obj.success = False
            return

        yield (0.6, "Writing defaults...")
        try:
            MdnavConfig().save()
        except RuntimeError as e:
            result_obj.output = ConfigInitOutput(config_path=str(path), errors=[str(e)]).model_dump(mode="python")
            result_obj.result = str(e)
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = ConfigInitOutput(config_path=str(path), written=True).model_dump(mode="python")
        result_obj.result = f"Wrote default configuration to {path}"
        result_obj.success = True

    return StageResult(announce="Initializing configuration...", progress_callback=do_work)
