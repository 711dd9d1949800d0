from wasmtargets.cli import main

main()
