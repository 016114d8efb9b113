from zero2prod.startup import main

if __name__ == "__main__":
    main()
