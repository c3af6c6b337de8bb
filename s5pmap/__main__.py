from .drivers import main


main()
