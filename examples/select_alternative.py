"""Select a Trustees Report alternative and print its average wage increases.

Usage:
    python examples/select_alternative.py [ALTERNATIVE] [FIRST_YEAR] [LAST_YEAR]

Shows the splice of historical, short-range and ultimate values, then a
custom override and a restore.
"""

import logging
import sys

from awinc import AssumptionStore


def show(store: AssumptionStore, alt_num: int, years: range):
    active = store.select(alt_num)
    print(f"\n{active.title}")
    for year in years:
        print(f"  {year}: {active[year]:9.6f}")


def main(argv: list[str]):
    alt_num = int(argv[1]) if len(argv) > 1 else 2
    first_year = int(argv[2]) if len(argv) > 2 else 1951
    last_year = int(argv[3]) if len(argv) > 3 else 2100

    store = AssumptionStore(first_year, last_year)
    around_splice = range(max(first_year, 2018), min(last_year, 2041) + 1)
    show(store, alt_num, around_splice)

    if not store.assumption_type.is_tr(alt_num):
        return

    # Flat 4% from 2030 on, on top of the published values
    custom = store.stored_series(alt_num)
    custom.assign(4.0, 2030, custom.last_year)
    store.set_series(alt_num, custom)
    store.set_title(alt_num, "Custom: flat 4% from 2030")
    show(store, alt_num, around_splice)

    store.restore(alt_num)
    show(store, alt_num, around_splice)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(name)s - %(levelname)s - %(message)s")
    main(sys.argv)
