from platform_banner.cli import run

if __name__ == "__main__":
    run()
