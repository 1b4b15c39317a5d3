from .pipeline import LinkBudgetReport

PASS_MESSAGE = "System meets specifications!"
FAIL_MESSAGE = "System failed to meet specifications!"


def fmt_freq(f: int) -> str:
    if f >= 1e9:
        return f"{f/1e9:g} GHz"
    if f >= 1e6:
        return f"{f/1e6:g} MHz"
    return f"{f:.0f} Hz"


def format_report(report: LinkBudgetReport) -> str:
    """Renders the selected components and computed powers, without the verdict line."""
    lines: list[str] = []
    if report.dynamic:
        amp = report.amplifier
        lines.append(f"Selected Amplifier: {amp.name} (Cost: ${amp.cost:g})")
    sw = report.switch
    lines.append(f"Selected Switch: {sw.name} (Cost: ${sw.cost:g})")

    cascade = report.cascade
    for f, p in zip(cascade.freqs, cascade.output_power):
        lines.append(f"Max Power Output at {fmt_freq(f)}: {p:g} dBm")
    for f, p in zip(cascade.freqs, cascade.leakage):
        lines.append(f"Leakage at {fmt_freq(f)}: {p:g} dBm")
    return "\n".join(lines)


def verdict(report: LinkBudgetReport) -> str:
    return PASS_MESSAGE if report.spec.passed else FAIL_MESSAGE
