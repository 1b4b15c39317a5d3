from pathlib import Path
import json
import logging
import sys

from io_utils import load_amplifier_strategy, load_catalog, load_system_config
from link_budget import SelectionError, run_link_budget
from link_budget.report import format_report, verdict

try:
    BASE = Path(__file__).parent
except NameError:
    BASE = Path.cwd()

PATH_TO_CONFIGURATION = BASE / "data" / "configurations.json"


def main(path_to_configuration: Path = PATH_TO_CONFIGURATION) -> int:
    with open(path_to_configuration, "r") as f:
        cfg = json.load(f)

    logging.basicConfig(
        level=cfg.get("log_level", "WARNING"),
        format="%(asctime)s-%(levelname)s-%(module)s-%(funcName)s: %(message)s",
    )

    config = load_system_config(cfg)
    catalog_path = path_to_configuration.parent / cfg.get("catalog", "components.json")
    catalog = load_catalog(catalog_path, config.freqs)
    strategy = load_amplifier_strategy(cfg, config.freqs)

    try:
        report = run_link_budget(catalog, config, strategy)
    except SelectionError as e:
        print(e, file=sys.stderr)
        return 1

    print(format_report(report))

    # A failed check is reported but is not an error exit
    if report.spec.passed:
        print(verdict(report))
    else:
        print(verdict(report), file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
