from raytracer.cli import main

main()
