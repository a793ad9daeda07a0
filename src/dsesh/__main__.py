from dsesh.cli import main

raise SystemExit(main())
