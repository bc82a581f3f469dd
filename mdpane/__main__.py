from mdpane.main import main

raise SystemExit(main())
