from linewrap.cli import main

raise SystemExit(main())
