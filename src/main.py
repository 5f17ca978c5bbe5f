import argparse
import os
import sys

# Add project root to sys.path to allow imports from 'src'
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))


def _build_services(config_dir: str, overrides):
    from src.builder import ApplicationBuilder
    from src.common.config import ConfigManager
    from src.common.logging import set_default_level

    cfg = ConfigManager(config_dir).load_app_config(overrides=overrides)
    set_default_level(cfg.logging.level)
    return ApplicationBuilder(cfg).build()


def _fail(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def main(argv=None) -> int:
    """
    Entry point for the lalin dashboard.

    Extra `key=value` arguments are applied as OmegaConf overrides, e.g.
    `python -m src.main serve api.base_url=http://10.0.0.5/api`.
    """
    parser = argparse.ArgumentParser(description="Lalin Dashboard")
    parser.add_argument('--config-dir', default='conf', help="Directory holding config.yaml")
    sub = parser.add_subparsers(dest='command', required=True)

    sub.add_parser('serve', help="Run the HTTP API")

    login = sub.add_parser('login', help="Log in and keep the session")
    login.add_argument('--username', required=True)
    login.add_argument('--password', required=True)

    sub.add_parser('logout', help="Drop the stored session")

    report = sub.add_parser('report', help="Print the daily report table")
    export = sub.add_parser('export', help="Write the daily report as PDF")
    for p in (report, export):
        p.add_argument('--tanggal', help="Report date (YYYY-MM-DD)")
        p.add_argument('--search', help="Filter on ruas or gerbang name")
        p.add_argument('--metode', default='Keseluruhan', help="Payment method")
        p.add_argument('--page', type=int, default=1)
        p.add_argument('--limit', type=int, default=10)
    export.add_argument('--output', help="Target file, defaults to Laporan_Lalin_<date>.pdf")

    args, unknown = parser.parse_known_args(argv)
    services = _build_services(args.config_dir, unknown)

    if args.command == 'serve':
        import uvicorn
        from src.app import create_app

        server_cfg = services.config.server
        app = create_app(services, cors_origins=list(server_cfg.cors_origins))
        uvicorn.run(app, host=server_cfg.host, port=server_cfg.port)
        return 0

    if args.command == 'login':
        result = services.auth_use_case.login(args.username, args.password)
        if not result.success:
            return _fail(result.error)
        print(f"Logged in as {result.data.username}")
        return 0

    if args.command == 'logout':
        services.auth_use_case.logout()
        print("Logged out")
        return 0

    from src.common.exceptions import ValidationError
    from src.lalin.domain import LalinFilters, PaymentMethod
    from src.lalin.infrastructure import report_filename

    try:
        method = PaymentMethod.parse(args.metode)
    except ValidationError as e:
        return _fail(", ".join(e.errors))

    tanggal = args.tanggal or services.config.report.default_date
    filters = LalinFilters(tanggal=tanggal, search=args.search)
    result = services.report_use_case.get_report_data(filters, args.page, args.limit)
    if not result.success:
        return _fail(result.error)

    if args.command == 'report':
        for line in services.report_use_case.build_table(result.data.rows, method):
            values = " ".join(f"{line.values.get(c, 0):>6}" for c in sorted(line.values))
            print(f"{line.label:<32} {values} {line.total:>8}")
        print(f"Page {result.data.current_page}/{result.data.total_pages}")
        return 0

    pdf = services.report_use_case.export_pdf(result.data.rows, filters, method)
    if not pdf.success:
        return _fail(pdf.error)
    output = args.output or report_filename(tanggal)
    with open(output, 'wb') as f:
        f.write(pdf.data)
    print(f"Saved {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
