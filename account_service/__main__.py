from account_service.app import main

main()
