from movieSearch.main import main

main()
