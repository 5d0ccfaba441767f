from create_anta_app.cli import create_anta_app

if __name__ == "__main__":
    create_anta_app()
