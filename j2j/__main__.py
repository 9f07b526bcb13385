from j2j.app.cli import main

if __name__ == "__main__":
    main()
