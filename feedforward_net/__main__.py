from feedforward_net.neural_network import main

if __name__ == "__main__":
    main()
