from fx_trend_report.cli import main

main()
