from colorline.cli import main

raise SystemExit(main())
