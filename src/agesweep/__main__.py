from agesweep.cli import main

raise SystemExit(main())
