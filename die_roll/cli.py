"""
cli.py
Command-line entry point: rolls a six-sided die 10,000 times using /dev/urandom and prints the distribution.
Related modules:
- core/config.py: RollConfig holds the run constants.
- core/entropy.py: DeviceEntropySource reads the entropy device.
- core/frequency.py: run_trials performs the rolls.
- core/report.py: print_report renders the result.
"""

import argparse
import logging
from typing import List, Optional

from die_roll.core.config import RollConfig
from die_roll.core.entropy import DeviceEntropySource
from die_roll.core.frequency import FrequencyTable, run_trials
from die_roll.core.report import print_report

logger = logging.getLogger(__name__)


def simulate(config: RollConfig) -> FrequencyTable:
    """
    Run every trial of a simulation against the configured entropy device.
    Args:
        config (RollConfig): Run constants.
    Returns:
        FrequencyTable: Completed tally.
    Raises:
        OSError: If the device cannot be opened or read.
    """
    with DeviceEntropySource(config.entropy_device) as source:
        return run_trials(config.trials, source, faces=config.faces)


def main(argv: Optional[List[str]] = None, config: Optional[RollConfig] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="die-roll",
        description="Roll a six-sided die 10,000 times using OS entropy and print the frequency of each face.",
    )
    parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    cfg = config or RollConfig()
    try:
        frequency = simulate(cfg)
    except OSError as e:
        logger.error("aborting after entropy failure: %s", e)
        raise SystemExit(f"Could not read entropy device {cfg.entropy_device}: {e}")

    print_report(frequency, cfg.trials)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
