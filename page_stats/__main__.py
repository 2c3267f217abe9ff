from page_stats.cli import cli

if __name__ == "__main__":
    cli()
