import argparse
import logging

from Activations import ACTIVATIONS, get_activation
from NeuralNet import ConfigurationError, Network

# --- Network parameters ---
INPUT_COUNT = 1
HIDDEN_LAYERS = [2]  # one hidden layer with 2 neurons
OUTPUT_COUNT = 1
EPOCHS = 10000
LR = 0.01
LOG_INTERVAL = 1000

# --- Training data for y = 2x ---
X_TRAIN = [[1.0], [2.0], [3.0], [4.0]]
Y_TRAIN = [[2.0], [4.0], [6.0], [8.0]]

PREDICT_AT = [5.0, 10.0, 525.0]


def build_parser():
    parser = argparse.ArgumentParser(description="Train a small network to learn y = 2x")
    parser.add_argument("--epochs", type=int, default=EPOCHS,
                        help=f"passes over the training data (default: {EPOCHS})")
    parser.add_argument("--lr", type=float, default=LR,
                        help=f"learning rate (default: {LR})")
    parser.add_argument("--hidden", type=int, nargs="*", default=HIDDEN_LAYERS,
                        help="hidden layer sizes (default: 2)")
    # sigmoid hidden, linear output so predictions aren't squashed into (0,1)
    parser.add_argument("--hidden-activation", default="sigmoid", choices=sorted(ACTIVATIONS))
    parser.add_argument("--output-activation", default="linear", choices=sorted(ACTIVATIONS))
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for weight initialisation (default: random)")
    parser.add_argument("--log-interval", type=int, default=LOG_INTERVAL,
                        help="epochs between loss reports, 0 to disable")
    parser.add_argument("--predict", type=float, nargs="+", default=PREDICT_AT,
                        help="x values to predict after training")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        net = Network(INPUT_COUNT, args.hidden, OUTPUT_COUNT,
                      hidden_activation=get_activation(args.hidden_activation),
                      output_activation=get_activation(args.output_activation),
                      learning_rate=args.lr,
                      seed=args.seed)
        print("Training...")
        net.train(X_TRAIN, Y_TRAIN, args.epochs, args.log_interval)
    except ConfigurationError as e:
        parser.error(str(e))
    print("Done.")

    for x in args.predict:
        pred = net.predict([x])[0]
        print(f"for x={x} predict y={pred}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
